"""
Hachage bcrypt des mots de passe.
Les appels bcrypt sont coûteux en CPU : ils tournent dans le threadpool
pour ne pas bloquer la boucle d'événements.
"""

import bcrypt
from fastapi.concurrency import run_in_threadpool

from app.config import settings

# bcrypt ne prend en compte que les 72 premiers octets du mot de passe
BCRYPT_MAX_BYTES = 72


def password_bytes(password: str) -> bytes:
    """
    Encode le mot de passe en UTF-8 et le tronque à 72 octets, comme le fait
    bcrypt lui-même. Les surrogates isolés (JSON "\\ud800") sont conservés
    tels quels plutôt que de faire échouer l'encodage.
    """
    return password.encode("utf-8", "surrogatepass")[:BCRYPT_MAX_BYTES]


async def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = await run_in_threadpool(bcrypt.hashpw, password_bytes(password), salt)
    return hashed.decode("utf-8")


async def verify_password(password: str, password_hash: str) -> bool:
    """Compare un mot de passe en clair à son hash ; False si le hash est illisible."""
    try:
        return await run_in_threadpool(
            bcrypt.checkpw, password_bytes(password), password_hash.encode("utf-8")
        )
    except ValueError:
        return False
