"""medtransfer: back office for a medical-transport dispatch business."""

__version__ = "0.3.0"
