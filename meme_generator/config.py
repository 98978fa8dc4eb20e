"""
Modulo per la gestione della configurazione del generatore di meme
"""
import copy
import os
import yaml
from typing import Dict, Any, Optional


class Config:
    """Classe per gestire la configurazione dell'applicazione (default < file YAML < CLI)"""

    DEFAULT_CONFIG = {
        'output_dir': './output',
        'export_scale': 2,
        'font_path': None,
        'preview': {
            'max_width': 800,
            'max_height': 400,
        },
        'top_text': {
            'content': '',
            'font_size': 48,
            'color': '#FFFFFF',
            'stroke_color': '#000000',
            'stroke_width': 3,
            'vertical_position': 15,
        },
        'bottom_text': {
            'content': '',
            'font_size': 48,
            'color': '#FFFFFF',
            'stroke_color': '#000000',
            'stroke_width': 3,
            'vertical_position': 85,
        },
    }

    # Sezioni unite chiave per chiave invece di essere sostituite
    NESTED_KEYS = ('preview', 'top_text', 'bottom_text')

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
                if file_config:
                    for key, value in file_config.items():
                        if key in self.NESTED_KEYS and isinstance(value, dict):
                            if not isinstance(self.config.get(key), dict):
                                self.config[key] = {}
                            self._deep_merge(self.config[key], value)
                        else:
                            self.config[key] = value
        except Exception as e:
            raise Exception(f"Error loading configuration file: {e}")

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base da aggiornare
            update: Dizionario con gli aggiornamenti
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione;
        i valori None vengono ignorati

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is None:
                continue
            if key in self.NESTED_KEYS and isinstance(value, dict):
                self._deep_merge(self.config[key], {k: v for k, v in value.items() if v is not None})
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave della configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore della configurazione
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Copia profonda del dizionario di configurazione
        """
        return copy.deepcopy(self.config)
