"""
Single-page city weather lookup widget.
"""
