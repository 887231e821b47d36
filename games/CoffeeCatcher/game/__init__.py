"""Coffee Catcher simulation components."""
