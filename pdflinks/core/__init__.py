"""
Core link handling: destinations, actions, URI codec and PDF writing.
"""
