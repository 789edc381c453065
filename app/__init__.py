"""
Command-line entry point and sample config file writer.
"""
