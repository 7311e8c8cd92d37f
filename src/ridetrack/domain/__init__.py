"""Domain layer for ridetrack application.

Services are imported from their modules directly; the database layer imports
entities from here, so this package stays free of service imports.
"""
