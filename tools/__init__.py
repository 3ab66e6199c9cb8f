"""
Command line tools

- cert_to_efi_sig_list: X.509 certificate -> EFI signature list (.esl)
- view_efi_sig_list: prints the contents of an .esl file
"""
