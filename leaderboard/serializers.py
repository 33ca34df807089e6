from rest_framework import serializers


class ScoreEntrySerializer(serializers.Serializer):
    """
    저장된 기록을 응답 형태로 변환합니다.

    응답의 "_id" 는 MongoDB 의 _id 가 아니라 플레이어 이름입니다.
    """

    name = serializers.JSONField()
    score = serializers.JSONField()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {"_id": data["name"], "score": data["score"]}
