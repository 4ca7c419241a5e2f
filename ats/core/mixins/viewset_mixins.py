class SerializerClassMapMixin:
    """
    Pick the serializer by action.

    .. code-block:: python

        serializer_class = CandidateWriteSerializer
        serializer_class_map = {
            'list': CandidateSerializer,
        }
    """
    serializer_class_map = {}

    def get_serializer_class(self):
        return self.serializer_class_map.get(
            self.action, super().get_serializer_class()
        )
