from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger


class EmptyDiagnosticLogger(IDiagnosticLogger):

    def log(self, message: str) -> None:
        """ an "empty" implementation.
        this will be used to satisfy IoC/DI needs when diagnostics are not wanted at all.
        """
        pass
