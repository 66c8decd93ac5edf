import orjson
import pytest

from src.service.booking.domain.seating_policy import (
    FullReservedSeating,
    OpenSeating,
    SectionReservedSeating,
)
from src.service.booking.driven_adapter.model.seating_policy_codec import (
    SeatingType,
    from_record,
    to_record,
)


@pytest.mark.unit
class TestToRecord:
    def test_open_has_no_config(self):
        assert to_record(OpenSeating()) == (SeatingType.OPEN, None)

    def test_full_reserved(self):
        discriminator, config = to_record(FullReservedSeating(total_seats=5000))

        assert discriminator == 'FullReserved'
        assert orjson.loads(config) == {'total_seats': 5000}

    def test_section_reserved(self):
        discriminator, config = to_record(SectionReservedSeating(sections={'VIP': 100}))

        assert discriminator == 'SectionReserved'
        assert orjson.loads(config) == {'sections': {'VIP': 100}}


@pytest.mark.unit
class TestFromRecord:
    @pytest.mark.parametrize(
        ('discriminator', 'expected'),
        [
            ('Open', OpenSeating()),
            ('FullReserved', FullReservedSeating(total_seats=0)),
            ('SectionReserved', SectionReservedSeating(sections={})),
        ],
    )
    @pytest.mark.parametrize('config', [None, '', '   ', '{}'])
    def test_missing_config_gives_zero_value(self, discriminator, expected, config):
        assert from_record(discriminator, config) == expected

    def test_reads_pascal_case_payloads(self):
        assert from_record('FullReserved', '{"TotalSeats": 300}') == FullReservedSeating(
            total_seats=300
        )
        assert from_record(
            'SectionReserved', '{"Sections": {"GoldenCircle": 100, "Balcony": 200}}'
        ) == SectionReservedSeating(sections={'GoldenCircle': 100, 'Balcony': 200})

    @pytest.mark.parametrize('discriminator', [None, '', 'Standing'])
    def test_unknown_discriminator_falls_back_to_open(self, discriminator):
        assert from_record(discriminator, '{"total_seats": 5}') == OpenSeating()

    def test_stored_record_reads_back(self):
        policy = SectionReservedSeating(sections={'GoldenCircle': 100, 'Balcony': 200})

        assert from_record(*to_record(policy)) == policy

    @pytest.mark.parametrize(
        ('discriminator', 'config', 'expected'),
        [
            ('FullReserved', '{not json', FullReservedSeating(total_seats=0)),
            ('FullReserved', '{"total_seats": "many"}', FullReservedSeating(total_seats=0)),
            ('SectionReserved', '{"sections": [1, 2]', SectionReservedSeating(sections={})),
            ('SectionReserved', '{"sections": ["VIP"]}', SectionReservedSeating(sections={})),
            ('SectionReserved', '{"sections": {"VIP": null}}', SectionReservedSeating(sections={})),
        ],
        ids=['bad-json', 'bad-total', 'bad-json-sections', 'list-sections', 'null-capacity'],
    )
    def test_malformed_config_falls_back_to_zero_value(self, discriminator, config, expected):
        assert from_record(discriminator, config) == expected
