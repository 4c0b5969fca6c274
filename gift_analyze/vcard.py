# Standard Library


#============================================


def build_vcard(name: str, email: str | None = None, tel: str | None = None) -> str:
	"""
	Return a vCard 4.0 contact card.

	Args:
		name: Formatted name; required.
		email: Optional email address.
		tel: Optional telephone number.

	Returns:
		str: Card text, newline separated, without a trailing newline.
	"""
	if not name or not name.strip():
		raise ValueError("A contact card needs a name")
	lines = [
		"BEGIN:VCARD",
		"VERSION:4.0",
		f"FN:{name.strip()}",
	]
	if email:
		lines.append(f"EMAIL:{email}")
	if tel:
		lines.append(f"TEL:{tel}")
	lines.append("END:VCARD")
	return "\n".join(lines)
