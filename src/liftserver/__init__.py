"""HTTP front end for lifttrace."""
