"""
Infrastructure layer: storage, validation and the web surface.
"""
