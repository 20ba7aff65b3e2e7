"""Order assignment and workflow validation engine for restaurant kitchens."""
