"""Error types shared by the workload, rendering and relay packages.

Nothing under `homepage.kernel` imports from `homepage.api`; the HTTP
mapping lives in `homepage.kernel.http`.
"""
