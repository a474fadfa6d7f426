"""The `dinopark` command-line interface."""
