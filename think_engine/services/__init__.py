"""Services Layer - tool handlers, artifact validation, and tool dispatch.

Invariants:
    - One handler class per stateful tool (stateless framework tools share one)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - Handlers run validate -> enforce -> commit so a rejected call never mutates state
"""
