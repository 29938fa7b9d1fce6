"""datepick - interactive terminal date picker."""

__version__ = "1.0.0"
__author__ = "datepick developers"
