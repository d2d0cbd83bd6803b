"""API Adapter — translates validation failures for the HTTP boundary."""
