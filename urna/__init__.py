"""Terminal electronic voting booth: voter registration, voting, results and candidate administration."""

__version__ = "1.0.0"