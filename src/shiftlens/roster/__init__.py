"""Roster inputs: data contract and loaders."""
