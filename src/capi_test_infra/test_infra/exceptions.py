class ManifestResourceNotFoundError(Exception):
    def __init__(self, path, kinds, *args: object) -> None:
        super().__init__(f"No resource of kind {'/'.join(kinds)} found in {path}", *args)
        self.path = path
        self.kinds = kinds


class KubeconfigContextError(Exception):
    pass


class PrerequisiteError(Exception):
    pass
