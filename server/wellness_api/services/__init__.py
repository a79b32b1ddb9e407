"""Service layer: auth, the generative text client and the AI requesters."""
