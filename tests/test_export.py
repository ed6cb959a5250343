import csv

import pytest

from zaminseva.locality import ScoringService, export_scored_properties, score_properties, summarize_scores
from zaminseva.locality.cache import get_default_service, reset_default_service

LISTINGS = [
    {'id': 'a', 'location': 'Koramangala, Bangalore', 'price': 15000000, 'area': 1100, 'type': 'apartment', 'yearBuilt': 2019},
    {'id': 'b', 'location': 'Patna', 'price': 4000000, 'type': 'land'},
    {'id': 'c', 'location': 'Near City Mall, Jaipur', 'price': 30000000, 'area': 2500, 'type': 'commercial'},
]


def test_score_properties_rows(service):
    rows = score_properties(LISTINGS, service=service)
    assert [r['id'] for r in rows] == ['a', 'b', 'c']
    assert rows[1]['area'] is None
    assert rows[0]['yearBuilt'] == 2019
    for r in rows:
        assert 40 <= r['localityScore'] <= 99
        assert 30 <= r['walkScore'] <= 99
        assert 35 <= r['amenitiesScore'] <= 99
    # Rows come from the service cache
    assert len(service) == 3


def test_export_csv(tmp_path, service):
    rows = score_properties(LISTINGS, service=service)
    rows[0]['agent'] = 'R. Shah'
    path = export_scored_properties(rows, out_dir=tmp_path / 'out')
    assert path.endswith('.csv')
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        data = list(reader)
    assert reader.fieldnames[:9] == [
        'id', 'location', 'price', 'area', 'type', 'yearBuilt',
        'localityScore', 'walkScore', 'amenitiesScore',
    ]
    assert reader.fieldnames[-1] == 'agent'
    assert len(data) == 3
    assert data[2]['walkScore'] == str(rows[2]['walkScore'])


def test_export_defaults_to_settings_dir(tmp_path, monkeypatch, service):
    from zaminseva.config import settings as settings_module
    monkeypatch.setattr(settings_module, '_settings', settings_module.Settings(EXPORT_DIR=tmp_path / 'exports'))
    path = export_scored_properties(score_properties(LISTINGS[:1], service=service))
    assert path.startswith(str(tmp_path / 'exports'))


def test_export_xlsx(tmp_path, service):
    pd = pytest.importorskip('pandas')
    pytest.importorskip('openpyxl')
    path = export_scored_properties(score_properties(LISTINGS, service=service), out_dir=tmp_path, fmt='XLSX')
    assert path.endswith('.xlsx')
    df = pd.read_excel(path)
    assert list(df['id']) == ['a', 'b', 'c']


def test_export_rejects_unknown_format(tmp_path):
    out = tmp_path / 'never'
    with pytest.raises(ValueError):
        export_scored_properties([], out_dir=out, fmt='pdf')
    assert not out.exists()


def test_summarize_scores(service):
    rows = score_properties(LISTINGS, service=service)
    summary = summarize_scores(rows)
    walk = [r['walkScore'] for r in rows]
    assert summary['walkScore']['count'] == 3
    assert summary['walkScore']['min'] == min(walk)
    assert summary['walkScore']['max'] == max(walk)
    assert summary['walkScore']['median'] == sorted(walk)[1]


def test_summarize_scores_objects_and_empty(service):
    assert summarize_scores([]) == {
        'localityScore': {'count': 0},
        'walkScore': {'count': 0},
        'amenitiesScore': {'count': 0},
    }
    s = service.get_scores(LISTINGS[0])
    summary = summarize_scores([s, s])
    assert summary['localityScore']['mean'] == s.locality_score
    assert summary['localityScore']['std'] == 0


def test_summarize_skips_missing_columns():
    summary = summarize_scores([{'localityScore': 80}, {'localityScore': 60, 'walkScore': ''}])
    assert summary['localityScore']['median'] == 70
    assert summary['walkScore'] == {'count': 0}


class _MaxRng:
    def uniform(self, a, b):
        return b


def test_score_properties_uses_given_empty_service():
    reset_default_service(ScoringService(rng=_MaxRng()))
    mine = ScoringService(variance=False)
    rows = score_properties([{'id': 'p', 'location': 'Patna', 'price': 8000000, 'area': 1200, 'type': 'apartment'}], service=mine)
    # 50 + 0.5*2 + 5, no jitter
    assert rows[0]['walkScore'] == 56
    assert len(mine) == 1
    assert len(get_default_service()) == 0


def test_score_properties_defaults_to_process_service():
    default = ScoringService(variance=False)
    reset_default_service(default)
    score_properties(LISTINGS)
    assert len(default) == 3


def test_export_xlsx_failure_falls_back_to_csv(tmp_path, monkeypatch, service, caplog):
    pd = pytest.importorskip('pandas')

    def _boom(self, *args, **kwargs):
        raise OSError('no excel engine')

    monkeypatch.setattr(pd.DataFrame, 'to_excel', _boom)
    path = export_scored_properties(score_properties(LISTINGS, service=service), out_dir=tmp_path, fmt='xlsx')
    assert path.endswith('.csv')
    with open(path, newline='', encoding='utf-8') as f:
        assert len(list(csv.DictReader(f))) == 3
    assert any('falling back to CSV' in r.getMessage() for r in caplog.records)
