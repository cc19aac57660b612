from __future__ import annotations

import datetime
import json
import re
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import tldextract

from linkview.core.config import ROOT, get as cfg_get
from .presenter import ResultsPresenter

# bundled suffix snapshot only, no download at runtime
_extract = tldextract.TLDExtract(suffix_list_urls=())


def target_host(url: str) -> str:
    u = urlparse(url)
    host = u.hostname or url
    ext = _extract(host)
    return ".".join(part for part in [ext.subdomain, ext.domain, ext.suffix] if part)


def resolve_reports_dir(out_dir_opt: Optional[str] = None) -> Path:
    if out_dir_opt:
        base = Path(out_dir_opt)
    else:
        env_dir = cfg_get("LINKVIEW_REPORTS_DIR")
        if env_dir:
            base = Path(env_dir) / "links"
        else:
            base = Path(ROOT) / "reports" / "links"
    base.mkdir(parents=True, exist_ok=True)
    return base


def compose_output_path(
    reports_dir: Path, target: str, json_out_opt: Optional[str] = None
) -> Path:
    if json_out_opt:
        p = Path(json_out_opt)
        if p.is_absolute():
            return p
        name = p.name if p.suffix == ".json" else f"{p.name}.json"
        return reports_dir / name
    ts = datetime.datetime.now(datetime.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    host_slug = re.sub(r"[^A-Za-z0-9_-]", "_", target_host(target).replace(".", "_"))
    return reports_dir / f"{host_slug or 'target'}_{ts}.json"


def build_report(presenter: ResultsPresenter, target: str, endpoint: str) -> dict:
    good, bad = presenter.summary()
    return {
        "target": target,
        "endpoint": endpoint,
        "generated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "summary": {"good": good, "bad": bad},
        "links": [
            {"ordinal": row.ordinal, "link": row.link, "status": row.status}
            for row in presenter.render()
        ],
    }


def write_report(
    presenter: ResultsPresenter,
    target: str,
    endpoint: str,
    out_dir: Optional[str] = None,
    json_out: Optional[str] = None,
) -> Path:
    out_path = compose_output_path(resolve_reports_dir(out_dir), target, json_out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    payload = build_report(presenter, target, endpoint)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return out_path
