"""Tests for the hashed-door vault puzzle."""

import pytest
from omegaconf import OmegaConf

from puzzle_solver.core.exceptions import InvalidInput, NoSolution
from puzzle_solver.puzzles.vault import Vault, VaultPuzzle, VaultState


class TestVault:
    """Test door opening and route search."""

    def test_open_doors(self):
        """Hash of 'hijkl' starts with 'ced9': up, down and left open."""
        vault = Vault('hijkl')

        assert [step for step, _, _ in vault.open_doors(vault.start)] == ['U', 'D', 'L']

    def test_walls_block_moves(self):
        vault = Vault('hijkl')

        neighbors = vault.neighbors(vault.start)
        assert neighbors == [(VaultState(0, 1, 'D'), 1)]

    def test_path_is_part_of_state(self):
        assert VaultState(1, 1, 'DR') != VaultState(1, 1, 'RD')

    def test_distance_to_vault(self):
        vault = Vault('hijkl')

        assert vault.distance_to_vault(vault.start) == 6
        assert vault.distance_to_vault(VaultState(3, 3)) == 0
        assert vault.is_vault(VaultState(3, 3, 'DDDRRR'))

    @pytest.mark.parametrize("passcode,expected", [
        ('ihgpwlah', 'DDRRRD'),
        ('kglvqrro', 'DDUDRLRRUDRD'),
        ('ulqzkmiv', 'DRURDRUDDLLDLUURRDULRLDUUDDDRR'),
    ])
    def test_shortest_path(self, passcode, expected):
        assert Vault(passcode).shortest_path() == expected

    @pytest.mark.parametrize("passcode,expected", [
        ('ihgpwlah', 370),
        ('kglvqrro', 492),
        ('ulqzkmiv', 830),
    ])
    def test_longest_path_length(self, passcode, expected):
        assert Vault(passcode).longest_path_length() == expected

    def test_sealed_vault(self):
        vault = Vault('hijkl')

        with pytest.raises(NoSolution):
            vault.shortest_path()
        with pytest.raises(NoSolution):
            vault.longest_path_length()


class TestVaultPuzzle:
    """Test the registered puzzle wrapper."""

    def test_parts(self):
        puzzle = VaultPuzzle()

        assert puzzle.part_1('ihgpwlah\n') == 'DDRRRD'
        assert puzzle.part_2('ihgpwlah\n') == '370'

    def test_empty_passcode(self):
        with pytest.raises(InvalidInput):
            VaultPuzzle().part_1('  \n')

    def test_grid_size_from_config(self):
        cfg = OmegaConf.create({'puzzles': {'vault': {'width': 2, 'height': 3}}})
        vault = VaultPuzzle(cfg).vault('ihgpwlah')

        assert (vault.width, vault.height) == (2, 3)
        assert vault.distance_to_vault(vault.start) == 3
