"""
The CONTROLLER layer routes user commands into the model and pushes the
resulting render requests to the view. Background work lives here too.
"""
