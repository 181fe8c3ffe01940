from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.credentials import AnonymousCredentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirestoreConfig:
    project_id: Optional[str] = None
    credentials_path: Optional[str] = None
    emulator_host: Optional[str] = None
    app_name: str = "attendance-cloud"


class _EmulatorCredential(credentials.Base):
    def get_credential(self):
        return AnonymousCredentials()


def _get_or_init_app(config: FirestoreConfig) -> firebase_admin.App:
    try:
        return firebase_admin.get_app(config.app_name)
    except ValueError:
        pass

    options = {"projectId": config.project_id} if config.project_id else None
    if config.credentials_path:
        cred = credentials.Certificate(config.credentials_path)
    elif config.emulator_host:
        # The emulator accepts any token; skip the metadata-server lookup.
        cred = _EmulatorCredential()
    else:
        cred = credentials.ApplicationDefault()
    return firebase_admin.initialize_app(cred, options, name=config.app_name)


def create_firestore_client(config: FirestoreConfig):
    """Build the Firestore client for one process.

    Called once by the container; repositories receive the client explicitly.
    """
    if config.emulator_host:
        os.environ["FIRESTORE_EMULATOR_HOST"] = config.emulator_host
        logger.info("Using Firestore emulator at %s", config.emulator_host)

    app = _get_or_init_app(config)
    return firestore.client(app)
