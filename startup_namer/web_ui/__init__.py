"""NiceGUI runtime exposing the suggestion list and saved list in a browser."""
