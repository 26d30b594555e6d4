"""Infrastructure: Firestore, Redis cache, translation, security."""
