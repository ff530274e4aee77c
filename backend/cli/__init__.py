"""Terminal editor for Linkora profiles."""
