"""Services exposed by the pynotes client."""
