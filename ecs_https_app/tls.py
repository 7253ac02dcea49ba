import os
import ssl

from ecs_https_app.errors import StartupConfigurationError


def load_tls_context(certfile: str, keyfile: str) -> ssl.SSLContext:
    """
    Build the server-side TLS context from a PEM certificate and key.

    Both files are checked before loading so the error names the one that is
    missing. Raises StartupConfigurationError, never falls back to plaintext.
    """
    for path in (certfile, keyfile):
        if not os.path.isfile(path):
            raise StartupConfigurationError(f"TLS file not found: {path}", path=path)
        if not os.access(path, os.R_OK):
            raise StartupConfigurationError(f"TLS file not readable: {path}", path=path)

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    try:
        context.load_cert_chain(certfile=certfile, keyfile=keyfile)
    except (ssl.SSLError, OSError) as e:
        raise StartupConfigurationError(
            f"cannot load TLS material from {certfile} and {keyfile}: {e}",
            path=certfile,
        ) from e
    return context
