"""
Interaction model: dual-value cells, headers, HTTP and messaging parts,
the Contract aggregate and its builder.

Import from the submodules (or from the ``dualcontract`` package root).
"""
