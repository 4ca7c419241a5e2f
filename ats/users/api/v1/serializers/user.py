from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer

User = get_user_model()


class UserThinSerializer(DynamicFieldsModelSerializer):
    """Public view of a user nested in other payloads"""

    class Meta:
        model = User
        fields = ('id', 'email', 'name', 'role')


class UserSerializer(DynamicFieldsModelSerializer):
    active = serializers.BooleanField(source='is_active', required=False)
    password = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'},
        validators=[validate_password]
    )

    class Meta:
        model = User
        fields = (
            'id', 'email', 'name', 'role', 'active', 'password',
            'last_login', 'created_at'
        )
        read_only_fields = ('last_login', 'created_at')

    def validate_email(self, email):
        qs = User.objects.filter(email__iexact=email)
        if self.instance:
            qs = qs.exclude(id=self.instance.id)
        if qs.exists():
            raise serializers.ValidationError(
                "User with this email already exists."
            )
        return email.lower()

    def validate(self, attrs):
        if not self.instance and not attrs.get('password'):
            raise serializers.ValidationError({
                'password': 'This field is required.'
            })
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        instance = super().update(instance, validated_data)
        if password:
            instance.set_password(password)
            instance.save(update_fields=['password'])
        return instance
