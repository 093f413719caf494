"""Core: settings, lifespan, exception handlers, rate limiter, constants."""
