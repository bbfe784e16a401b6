"""Hosts that connect the editor engine to a real terminal."""
