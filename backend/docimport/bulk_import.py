import sys
from typing import List, Optional

import httpx

from .client import make_client, upload_file
from .extensions import describe_extensions, resolve_extensions
from .schemas import ImportSummary
from .utils.files import display_name, filter_candidates, scan_directory

USAGE = "usage: bulk_import.py <projectId> <documentsDir> [fileExtensions]"

def run(project_id: str, documents_dir: str, ext_param: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None) -> ImportSummary:
    config = resolve_extensions(ext_param)
    describe_extensions(config)

    print(f"scanning directory: {display_name(documents_dir)}")
    files = scan_directory(documents_dir)
    candidates = filter_candidates(files, config)
    summary = ImportSummary(total_files=len(files), candidates=len(candidates))
    if not candidates:
        print(f"no supported files found. supported: {', '.join(config.accepted)}")
        return summary

    print(f"found {len(candidates)} supported files ({len(files)} files total)")
    with make_client(transport) as client:
        for p in candidates:
            if upload_file(client, p, project_id, config).ok:
                summary.uploaded += 1
    print(f"\nbulk import finished: {summary.uploaded}/{summary.candidates} files uploaded")
    return summary

def main(argv: Optional[List[str]] = None, transport: Optional[httpx.BaseTransport] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 1
    project_id, documents_dir = args[0], args[1]
    ext_param = args[2] if len(args) > 2 else None
    try:
        run(project_id, documents_dir, ext_param, transport=transport)
    except OSError as e:
        print(f"bulk import failed: {display_name(str(e))}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
