"""Console front end for the vehicle rental application."""
