"""
Tests for the filter/sort engine.
"""
from services.filter_service import available_specialties, derive
from services.models import ConsultMode, Criteria, Provider, SortKey


def _names(doctors):
    return [d.name for d in doctors]


def _doc(name, fees=0, experience=0, remote=False, speciality=("X",)):
    return Provider(name=name, fees=fees, experience=experience, videoConsult=remote, speciality=speciality)


class TestFiltering:
    """Consultation mode and specialty filters."""

    def test_no_criteria_keeps_everything_in_order(self, sample_doctors):
        assert derive(sample_doctors, Criteria()) == sample_doctors

    def test_remote_mode_keeps_video_consult_only(self):
        first = _doc("first", fees=100, remote=True, speciality=["X"])
        second = _doc("second", fees=50, remote=False, speciality=["Y"])
        result = derive([first, second], Criteria(mode=ConsultMode.REMOTE))
        assert result == [first]

    def test_in_person_mode_keeps_clinic_only(self, sample_doctors):
        result = derive(sample_doctors, Criteria(mode=ConsultMode.IN_PERSON))
        assert _names(result) == ["Dr. Bala"]

    def test_specialties_are_or_combined(self):
        first = _doc("first", fees=100, remote=True, speciality=["X"])
        second = _doc("second", fees=50, remote=False, speciality=["Y"])
        result = derive([first, second], Criteria(specialties=frozenset({"X", "Y"})))
        assert result == [first, second]

    def test_specialty_match_is_exact(self, sample_doctors):
        result = derive(sample_doctors, Criteria(specialties=frozenset({"dentist"})))
        assert result == []

    def test_unknown_specialty_matches_nobody(self, sample_doctors):
        assert derive(sample_doctors, Criteria(specialties=frozenset({"Astrologer"}))) == []

    def test_missing_speciality_excluded_when_specialty_filter_active(self):
        bare = Provider(name="bare", speciality=None)
        tagged = _doc("tagged", speciality=["X"])
        assert derive([bare, tagged], Criteria(specialties=frozenset({"X"}))) == [tagged]
        assert derive([bare, tagged], Criteria()) == [bare, tagged]

    def test_mode_and_specialty_combine(self, sample_doctors):
        criteria = Criteria(mode=ConsultMode.REMOTE, specialties=frozenset({"Dentist", "Cardiologist"}))
        assert _names(derive(sample_doctors, criteria)) == ["Dr. Asha", "Dr. Chen"]

    def test_input_is_not_modified(self, sample_doctors):
        before = list(sample_doctors)
        derive(sample_doctors, Criteria(sort_key=SortKey.FEES))
        assert sample_doctors == before


class TestSorting:
    """Fees ascending, experience descending, both stable."""

    def test_fees_sort_is_stable(self):
        docs = [_doc("a", fees=10), _doc("b", fees=10), _doc("c", fees=5)]
        result = derive(docs, Criteria(sort_key=SortKey.FEES))
        assert _names(result) == ["c", "a", "b"]

    def test_experience_sort_is_descending_and_stable(self):
        docs = [_doc("a", experience=3), _doc("b", experience=9), _doc("c", experience=3), _doc("d", experience=9)]
        result = derive(docs, Criteria(sort_key=SortKey.EXPERIENCE))
        assert _names(result) == ["b", "d", "a", "c"]

    def test_sort_applies_after_filtering(self, sample_doctors):
        criteria = Criteria(mode=ConsultMode.REMOTE, sort_key=SortKey.FEES)
        assert _names(derive(sample_doctors, criteria)) == ["Dr. Chen", "Dr. Asha", "Dr. Dev"]

    def test_repeated_derive_is_identical(self, sample_doctors):
        criteria = Criteria(sort_key=SortKey.EXPERIENCE)
        assert derive(sample_doctors, criteria) == derive(sample_doctors, criteria)


def test_available_specialties_sorted_and_unique(sample_doctors):
    assert available_specialties(sample_doctors) == [
        "Cardiologist",
        "Dentist",
        "Dietitian/Nutritionist",
        "General Physician",
    ]
