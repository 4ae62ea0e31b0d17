import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.validator import ValidationIssue, optional_text
from services.contact_service import ContactService

router = APIRouter()
logger = logging.getLogger(__name__)


class ParsePayload(BaseModel):
    summary: Any = None
    description: Any = None


@router.get("/", response_class=PlainTextResponse)
def hello():
    return "Hello from my parse server - route /parse to POST your data!"


@router.post("/parse")
def parse_event(payload: ParsePayload = Body(...)):
    """
    Reçoit { summary, description } et renvoie la fiche contact :
    type, prenom, telephone (formaté ou "Erreur: ..."), nomFamille, prix.
    """
    try:
        summary = optional_text(payload.summary, field="summary")
        description = optional_text(payload.description, field="description")

        record = ContactService.parse_event(summary, description)
        return record.to_dict()

    except ValidationIssue as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Erreur parse_event", exc_info=exc)
        raise HTTPException(status_code=500, detail="Erreur interne") from exc
