"""Static reference tables (deity rosters, name lists) shipped as JSON."""
