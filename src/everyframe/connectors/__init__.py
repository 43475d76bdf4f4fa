"""Host front-ends that drive the refresh tick."""
