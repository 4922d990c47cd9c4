import os
import sys
import json
from pathlib import Path

from azure.identity import DefaultAzureCredential

from authenticate import authenticate_with_certificate
from identifiers import derive
from keyvault import get_app_only_certificate, get_secret
from sharepoint import get_client_context, get_web_title

SETTINGS_FILE = "appsettings.json"
ENV_OVERRIDES = {
    "environment": "SPO_ENVIRONMENT",
    "site": "SPO_SITE",
    "name": "SPO_NAME",
}


def load_config(path: str = SETTINGS_FILE) -> dict:
    # settings file is optional, env vars win over it
    cfg = {}
    if Path(path).is_file():
        with open(path, "r", encoding="utf-8") as f:
            try:
                cfg = json.load(f)
            except json.JSONDecodeError as exc:
                raise SystemExit(f"{path} is not valid JSON: {exc}")
    else:
        print(f"[config] {path} not found, using environment only", file=sys.stderr)

    for key, env_var in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value is not None:
            cfg[key] = value
    return cfg


def run(cfg: dict, credential=None) -> str:
    # --- 1) Derive names from config ---
    ids = derive(cfg)
    print(
        f"[config] site={ids.site_url} identity={ids.identity} "
        f"vault={ids.key_vault_name} tenant={ids.tenant_id}",
        file=sys.stderr,
    )

    # --- 2) Pull client id + certificate from Key Vault ---
    owned = credential is None
    if owned:
        credential = DefaultAzureCredential()
    try:
        client_id = get_secret(ids.key_vault_name, ids.client_id_secret_name, credential)
        certificate = get_app_only_certificate(ids.key_vault_name, ids.certificate_name, credential)
    finally:
        if owned:
            credential.close()

    # --- 3) App-only token for SharePoint ---
    access_token = authenticate_with_certificate(client_id, certificate, ids.tenant_id, [ids.scope])

    # --- 4) Load the web and read its title ---
    session = get_client_context(ids.site_url, access_token)
    try:
        return get_web_title(session, ids.site_url)
    finally:
        session.close()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        raise SystemExit("Usage: python get_site_title.py [appsettings.json]")
    cfg = load_config(argv[0] if argv else SETTINGS_FILE)

    try:
        title = run(cfg)
    except Exception as exc:
        raise SystemExit(f"[error] {type(exc).__name__}: {exc}") from exc
    print(title)


if __name__ == "__main__":
    main()
