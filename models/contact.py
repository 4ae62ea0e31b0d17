from dataclasses import dataclass
from typing import Optional


@dataclass
class ContactRecord:
    status: str
    type: Optional[str] = None
    prenom: Optional[str] = None
    telephone: Optional[str] = None
    nom_famille: Optional[str] = None
    prix: Optional[str] = None
    message: Optional[str] = None
    summary: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict:
        if self.type is None and self.telephone is None:
            # Échec de parsing du summary : réponse minimale
            return {"status": self.status, "message": self.message, "summary": self.summary}

        data = {
            "status": self.status,
            "type": self.type,
            "prenom": self.prenom,
            "telephone": self.telephone,
            "nomFamille": self.nom_famille,
            "prix": self.prix,
        }
        if self.message:
            data["message"] = self.message
        return data
