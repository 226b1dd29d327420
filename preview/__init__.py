"""Command line fatigue preview for planned training weeks."""
