"""fibtemp: a Fibonacci position evaluator and a temperature converter."""

__version__ = "0.1.0"
