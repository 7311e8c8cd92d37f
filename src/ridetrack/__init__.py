"""Ridetrack - earnings and expense tracking for ride-share drivers."""

__version__ = "0.1.0"
