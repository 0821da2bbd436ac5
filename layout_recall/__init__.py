"""layout-recall – capture and restore macOS window layouts."""
