"""Property-based testing for WizardFlow components.

These tests use Hypothesis to check the wizard's invariants over generated
field values and navigation sequences rather than hand-picked examples.
"""
