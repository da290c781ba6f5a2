"""
Accounts app serializers
"""
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    ``has_candidate_profile`` tells clients whether experience editing is
    available. Only staff and MIS users may change a role after signup.
    """

    has_candidate_profile = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'has_candidate_profile',
            'password',
        ]
        extra_kwargs = {
            'password': {'write_only': True, 'required': False},
        }

    def get_has_candidate_profile(self, obj):
        return hasattr(obj, 'candidate_profile')

    def validate_role(self, value):
        request = self.context.get('request')
        if self.instance is None or request is None or value == self.instance.role:
            return value
        if request.user.is_staff or request.user.role == User.MIS:
            return value
        raise serializers.ValidationError('Only MIS staff can change a role.')

    def create(self, validated_data):
        password = validated_data.pop('password', None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save()
        return user

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        instance = super().update(instance, validated_data)
        if password:
            instance.set_password(password)
            instance.save(update_fields=['password'])
        return instance
