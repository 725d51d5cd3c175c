"""
HTTP API of the bed board.
"""
