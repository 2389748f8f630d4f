"""clubviz: grid rendering of club membership snapshots."""
