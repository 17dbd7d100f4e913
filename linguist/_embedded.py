#
# Generated file - DO NOT EDIT
# Generated from: linguist/locales/translations.json
#

from typing import Dict


def get_embedded_translations() -> Dict[str, Dict[str, str]]:
    return {
        "language.name": {
            "en-US": "English",
            "fr-FR": "Français",
            "es-ES": "Español",
            "de-DE": "Deutsch",
        },
        "common.ok": {
            "en-US": "OK",
            "fr-FR": "OK",
            "es-ES": "Aceptar",
            "de-DE": "OK",
        },
        "common.cancel": {
            "en-US": "Cancel",
            "fr-FR": "Annuler",
            "es-ES": "Cancelar",
            "de-DE": "Abbrechen",
        },
        "common.save": {
            "en-US": "Save",
            "fr-FR": "Enregistrer",
            "es-ES": "Guardar",
            "de-DE": "Speichern",
        },
        "errors.not_found": {
            "en-US": "\"%s\" was not found",
            "fr-FR": "« %s » est introuvable",
            "es-ES": "No se encontró \"%s\"",
            "de-DE": "„%s“ wurde nicht gefunden",
        },
    }
