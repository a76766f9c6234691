"""Application composition layer for the Tkinter GUI.

Controllers in this package wire views, view models and the word-pair
source into the runnable desktop app without placing logic in views.
"""
