"""Terminal control and keyboard input."""
