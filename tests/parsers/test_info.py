"""Tests for INFO and FORMAT/sample decoding."""

from oncofhir_vcf.parsers import InfoMap, parse_info, parse_sample_block, parse_sample_fields


class TestParseInfo:
    def test_key_values_and_flags(self):
        info = parse_info("GENE=EGFR;SOMATIC;AF=0.35")

        assert dict(info) == {"GENE": "EGFR", "SOMATIC": True, "AF": "0.35"}

    def test_splits_on_first_equals_only(self):
        info = parse_info("HGVS=NM_005228.5:c.2573T>G;NOTE=a=b")

        assert info["HGVS"] == "NM_005228.5:c.2573T>G"
        assert info["NOTE"] == "a=b"

    def test_missing_info(self):
        assert len(parse_info(".")) == 0
        assert len(parse_info("")) == 0

    def test_empty_tokens_ignored(self):
        info = parse_info("GENE=KRAS;;DB;")

        assert list(info) == ["GENE", "DB"]

    def test_unrecognized_keys_retained(self):
        info = parse_info("GENE=BRAF;MQ=60;CUSTOM=x")

        assert info["MQ"] == "60"
        assert info["CUSTOM"] == "x"


class TestInfoMapLookup:
    def test_lookup_is_case_insensitive(self):
        info = parse_info("gene=ALK;Af=0.2")

        assert info.lookup("GENE") == "ALK"
        assert info.lookup("AF") == "0.2"
        assert "GENE" not in info

    def test_exact_spelling_preferred(self):
        info = InfoMap([("gene", "lower"), ("GENE", "upper")])

        assert info.lookup("GENE") == "upper"
        assert info.lookup("Gene") == "lower"

    def test_get_text_ignores_flags_and_missing(self):
        info = parse_info("GENE=.;SOMATIC;HGVS=")

        assert info.get_text("GENE") is None
        assert info.get_text("SOMATIC") is None
        assert info.get_text("HGVS") is None
        assert info.get_text("ABSENT") is None

    def test_first_text(self):
        info = parse_info("HGVSC=c.35G>A")

        assert info.first_text(("HGVS", "HGVSC")) == "c.35G>A"


class TestSampleDecoding:
    def test_zip_format_and_values(self):
        fields = parse_sample_fields(["GT", "AD", "DP", "VAF"], "0/1:70,30:100:0.3")

        assert fields == {"GT": "0/1", "AD": "70,30", "DP": "100", "VAF": "0.3"}

    def test_short_sample_leaves_trailing_keys_absent(self):
        fields = parse_sample_fields(["GT", "AD", "DP"], "0/1")

        assert fields == {"GT": "0/1"}
        assert "AD" not in fields

    def test_sample_block_uses_header_names(self):
        block = parse_sample_block("GT:AD", ["1/0:10,5", "2/1:3,4"], ["Germline", "Somatic"])

        assert block is not None
        assert block.format_keys == ["GT", "AD"]
        assert block.samples["Somatic"] == {"GT": "2/1", "AD": "3,4"}
        assert block.first_sample() == {"GT": "1/0", "AD": "10,5"}
        assert block.genotypes() == ["1/0", "2/1"]

    def test_no_sample_names_means_no_block(self):
        assert parse_sample_block("GT", ["0/1"], []) is None

    def test_no_format_means_no_block(self):
        assert parse_sample_block("", [], ["S1"]) is None
        assert parse_sample_block(".", ["0/1"], ["S1"]) is None

    def test_extra_sample_columns_ignored(self):
        block = parse_sample_block("GT", ["0/1", "1/1"], ["S1"])

        assert list(block.samples) == ["S1"]

    def test_genotypes_skip_samples_without_gt(self):
        block = parse_sample_block("DP:GT", ["30", "25:0/1"], ["S1", "S2"])

        assert block.genotypes() == ["0/1"]
