"""Runnable example applications built on cellui."""
