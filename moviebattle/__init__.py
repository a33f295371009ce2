"""
Movie battle: turns a movie's runtime and rating into combat stats and lets it
attack a single opponent once.
"""
