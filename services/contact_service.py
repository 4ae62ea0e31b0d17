import logging
from typing import Optional

from app.logging_config import mask_phone
from models.contact import ContactRecord
from services.event_parser import parse_description, parse_summary
from services.phone_normalizer import format_number


logger = logging.getLogger(__name__)

SUMMARY_PARSE_ERROR = "Impossible de parser le summary correctement"


class ContactService:

    @staticmethod
    def parse_event(
        summary: Optional[str],
        description: Optional[str],
        default_price: Optional[str] = None,
    ) -> ContactRecord:
        """
        Construit la fiche contact d'un événement d'agenda.
        - summary non exploitable -> status "error" + summary renvoyé tel quel
        - numéro refusé -> status "error", telephone/message = "Erreur: ..."
        """
        parts = parse_summary(summary)
        if not parts.type or not parts.phone_raw:
            logger.warning("Summary non exploitable", extra={"summary_len": len(summary or "")})
            return ContactRecord(status="error", message=SUMMARY_PARSE_ERROR, summary=summary)

        phone = format_number(parts.phone_raw)
        desc = parse_description(description, default_price)

        record = ContactRecord(
            status="ok",
            type=parts.type,
            prenom=parts.prenom,
            telephone=phone.display(),
            nom_famille=desc.nom_famille,
            prix=desc.prix,
        )

        if not phone.ok:
            record.status = "error"
            record.message = phone.display()
            logger.info(
                "Numéro refusé pour l'événement",
                extra={"type": parts.type, "phone": mask_phone(parts.phone_raw), "error": phone.error.value},
            )
        else:
            logger.info(
                "Événement analysé",
                extra={"type": parts.type, "phone": mask_phone(phone.value), "line_type": phone.label},
            )
        return record
