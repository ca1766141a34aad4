"""Synthetic workload demo endpoints.

GET /hash?amount=N   hash N random strings with SHA-512
GET /sleep?length=N  hold the response for N milliseconds

Both default to 1000, accept 0..10000 inclusive, and always answer 200 with
the index page carrying either a success or an error message.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from homepage.api.dependencies import get_templates, render_page
from homepage.rendering import TemplateRegistry, outcome_payload
from homepage.workloads import WorkloadKind, WorkloadRequest, run_workload

router = APIRouter()


async def _handle(kind: WorkloadKind, raw: str | None, templates: TemplateRegistry) -> HTMLResponse:
    outcome = await run_workload(WorkloadRequest(kind=kind, raw_parameter=raw))
    return render_page(templates, outcome_payload(kind, outcome))


@router.get("/hash", response_class=HTMLResponse)
async def hash_demo(
    amount: str | None = Query(default=None),
    templates: TemplateRegistry = Depends(get_templates),
):
    """Run the CPU-bound hashing demo."""
    return await _handle(WorkloadKind.HASH, amount, templates)


@router.get("/sleep", response_class=HTMLResponse)
async def sleep_demo(
    length: str | None = Query(default=None),
    templates: TemplateRegistry = Depends(get_templates),
):
    """Run the blocking sleep demo."""
    return await _handle(WorkloadKind.SLEEP, length, templates)
