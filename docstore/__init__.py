# Local object store for uploaded documents
