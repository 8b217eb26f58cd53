from docimport.bulk_import import main

if __name__ == "__main__":
    raise SystemExit(main())
