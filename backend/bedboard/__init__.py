"""
Hospital bed board: bed map filters, selection, occupancy panel and
transfer workflow.
"""
__version__ = "1.0.0"
