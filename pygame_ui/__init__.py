"""PyGame front end for the MockJack table."""
