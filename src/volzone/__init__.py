"""Return-distribution and volatility-triggered DCA simulation engine."""

__version__ = "0.1.0"
