"""
Endpoints untuk form access configuration status
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..schemas import FormAccessStatusResponse, KeyStatus
from ...core.config import FORM_ACCESS_KEYS, KEY_GROUPS
from ...core.form_access import FormAccessConfigError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/form-access", tags=["Form Access"])


@router.get("/status", response_model=FormAccessStatusResponse)
async def form_access_status(request: Request):
    """
    Report which form access keys are configured.
    Returns 503 when the configuration is incomplete; the form ID is never shown.
    """
    loader = request.app.state.config_loader

    try:
        config = loader()
    except FormAccessConfigError as e:
        logger.warning(f"⚠️ Form access status requested while configuration is invalid: {e}")
        # problems keyed by file path mean no key could be read at all
        source_failed = not any(key in e.problems for key in FORM_ACCESS_KEYS)
        keys = [
            KeyStatus(key=key, group=KEY_GROUPS[key],
                      configured=not source_failed and key not in e.problems,
                      problem=e.problems.get(key))
            for key in FORM_ACCESS_KEYS
        ]
        response = FormAccessStatusResponse(
            success=False,
            message=str(e),
            keys=keys,
            total_keys=len(keys),
            configured_keys=sum(1 for k in keys if k.configured),
        )
        return JSONResponse(status_code=503, content=response.model_dump())

    keys = [KeyStatus(key=key, group=KEY_GROUPS[key], configured=True) for key in FORM_ACCESS_KEYS]
    return FormAccessStatusResponse(
        success=True,
        message="Form access configuration is complete",
        keys=keys,
        values=config.redacted(),
        total_keys=len(keys),
        configured_keys=len(keys),
    )
