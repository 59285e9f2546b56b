from rest_framework import serializers


class RecipientSerializer(serializers.Serializer):
    memberId = serializers.IntegerField(source='id', read_only=True)
    name = serializers.CharField(source='full_name', read_only=True)
    email = serializers.EmailField(read_only=True)


class AuditionAnnouncementSerializer(serializers.Serializer):
    auditionDateId = serializers.UUIDField()
    subject = serializers.CharField(max_length=200)
    body = serializers.CharField()
