"""UI — Qt host widgets for the amount engine."""
