"""Terminal front end for Connect Four."""
