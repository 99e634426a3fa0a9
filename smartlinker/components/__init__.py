"""Components: pure domain logic and external-service clients."""
