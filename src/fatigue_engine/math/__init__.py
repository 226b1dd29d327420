"""Pure fatigue model math: load conversion, state updates, overload detection."""
