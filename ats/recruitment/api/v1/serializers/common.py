from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.models import Candidate, Company


class CandidateThinSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Candidate
        fields = ('id', 'name', 'email', 'deleted', 'blacklisted')


class CompanyThinSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Company
        fields = ('id', 'name', 'status')
