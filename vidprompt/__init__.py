"""vidprompt - turn a one-line concept into a four-scene text-to-video blueprint."""

__version__ = "0.1.0"
