"""Property configuration objects, configurators and the builder running them."""
