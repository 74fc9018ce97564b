"""Core uploader components."""
