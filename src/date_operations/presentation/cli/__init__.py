"""Typer command-line application."""
