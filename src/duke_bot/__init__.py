# src/duke_bot/__init__.py

"""Line-command task tracker with flat-file persistence."""

__version__ = "0.1.0"
