"""Discretize linear and circular-arc motion commands into waypoints for a walker."""
