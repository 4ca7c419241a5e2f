from rest_framework.serializers import ModelSerializer


class DynamicFieldsModelSerializer(ModelSerializer):
    """
    A ModelSerializer that takes an additional `fields` and 'exclude_fields'
    argument that controls which fields should be displayed and not to be
    displayed.
    """

    def __init__(self, instance=None, *args, **kwargs):
        # Don't pass the 'fields' arg up to the superclass
        fields = kwargs.pop('fields', None)
        exclude_fields = kwargs.pop('exclude_fields', None)

        super().__init__(instance, *args, **kwargs)

        if fields is not None:
            allowed = set(fields)
            existing = set(self.fields.keys())
            for field_name in existing - allowed:
                self.fields.pop(field_name)
        if exclude_fields is not None:
            for field_name in set(exclude_fields):
                self.fields.pop(field_name, None)

    def get_extra_kwargs(self):
        extra_kwargs = super().get_extra_kwargs()
        create_only_fields = getattr(self.Meta, 'create_only_fields', None)

        if self.instance and create_only_fields:
            for field_name in create_only_fields:
                kwargs = extra_kwargs.get(field_name, {})
                kwargs['read_only'] = True
                extra_kwargs[field_name] = kwargs

        return extra_kwargs


class ReadSerializerMixin:
    """
    Write serializer that answers with a richer read serializer.

    Set `read_serializer_class` on the write serializer's Meta.
    """

    def to_representation(self, instance):
        read_serializer_class = getattr(self.Meta, 'read_serializer_class', None)
        if read_serializer_class is None:
            return super().to_representation(instance)
        return read_serializer_class(instance, context=self.context).data
