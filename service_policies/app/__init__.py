"""
Policy Service package for the Folio access layer.

This package decides whether an actor may perform an action on a document,
collection, team, revision or user. It provides:

- app.main: PolicyService facade used by the request layer.
- app.policies: Rule registry, decision engine, precondition guard, tree
  containment check and the rule families for each resource kind.
- app.bootstrap: One-time construction of the frozen registry and engine.
- app.access: Request-layer helpers (authorize, abilities).
- app.membership: Role and suspension transitions for tenant members.

Guidelines:
- Decisions are pure; the caller loads every relation a rule needs.
- A missing relation is a PreconditionFault, never a denial.
- Ungoverned actions are denied.
"""
