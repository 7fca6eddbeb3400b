"""pulsegate command line interface."""
