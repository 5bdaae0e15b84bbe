"""Command line interface for the dot point tracker."""
