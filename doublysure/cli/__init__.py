"""doublysure command line interface."""
