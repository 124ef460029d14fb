"""Command line interface for the HR cache library."""
