"""DistanceTable: planar and great-circle distance tables from a fixed origin."""
