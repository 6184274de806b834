"""Rendering of session state into rich renderables."""
