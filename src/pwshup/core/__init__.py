"""Core setup pipeline for pwshup."""
