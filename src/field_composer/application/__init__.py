"""Application layer: pure combinators and the ports they consume."""
